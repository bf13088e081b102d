from .utils import (
    WGS84_a,
    WGS84_b,
    WGS84_rf,
    make_3_tuple_array,
    ecf2geo,
    geo2ecf,
)
