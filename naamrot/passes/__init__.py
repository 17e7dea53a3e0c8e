"""Passes — Text-level pipeline stages for Naamrot conversion."""

from naamrot.passes.p00_scan_tokens import scan_tokens
from naamrot.passes.p10_split_parts import split_parts
from naamrot.passes.p20_transform_parts import transform_parts
from naamrot.passes.p30_assemble import assemble

__all__ = [
    "scan_tokens",
    "split_parts",
    "transform_parts",
    "assemble",
]
