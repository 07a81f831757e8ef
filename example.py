#!/usr/bin/env python3
"""
hexseq - Usage Example

Demonstrates the common conversions a JSON-RPC client performs.
"""

from hexseq import (
    HexCodec,
    HexSeqError,
    concat,
    from_number,
    from_string,
    pad,
    pad_right,
    slice_bytes,
    to_nat,
    to_string,
)


def main():
    print("=" * 60)
    print("hexseq Example")
    print("=" * 60)

    # Encode a call argument as a 32-byte ABI word
    print("\n=== Numbers ===")
    amount = from_number(1500)
    word = pad(32, amount)
    print(f"1500 -> {amount}")
    print(f"ABI word: {word}")
    print(f"Decoded back: {to_nat(word)}")

    # Encode and decode a string payload
    print("\n=== Text ===")
    encoded = from_string("gm, wörld")
    if encoded.success:
        payload = pad_right(32, encoded.value)
        print(f"Padded payload: {payload}")
        print(f"Decoded: {to_string(payload, strip_padding=True).unwrap()!r}")

    # Binary data is not text: the result says so instead of raising
    decoded = to_string("0xfffe")
    print(f"0xfffe is text? {decoded.success} ({decoded.error})")

    # Build and take apart a tuple of fields
    print("\n=== Structure ===")
    packed = concat("0x01", pad(4, "0xbeef"), "0xff")
    print(f"Packed: {packed}")
    print(f"Field 2: {slice_bytes(1, 5, packed)}")

    # Randomness comes from the codec's entropy source
    print("\n=== Randomness ===")
    codec = HexCodec()
    print(f"Nonce: {codec.random(32)}")

    # Every failure is a HexSeqError
    print("\n=== Errors ===")
    for bad in ("abcd", "0xabc", "0xzz"):
        try:
            codec.length(bad)
        except HexSeqError as e:
            print(f"{bad!r}: {e.message}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
