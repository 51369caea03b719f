"""Bit-stream engine: the Mersenne Twister and seed combination helpers."""

from .mersenne import MersenneTwister
from .seed import combine_seed, hash_component, to_uint32

__all__ = ["MersenneTwister", "combine_seed", "hash_component", "to_uint32"]
