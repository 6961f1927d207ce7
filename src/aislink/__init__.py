"""AISLINK: AIS (ITU-R M.1371) six-bit message codec, gateway and relay."""

__version__ = "0.1.0"
