"""Policy configuration for codecs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Encoding and decoding policy, fixed for the lifetime of a codec.

    Both knobs apply to encode and decode alike so a codec never mixes
    behaviors: a padded codec only emits and accepts padded text.
    """
    pad: bool = True  # Emit/require '=' to fill the last group to 4 symbols
    strict_filler_bits: bool = True  # Reject text whose filler bits are not zero
