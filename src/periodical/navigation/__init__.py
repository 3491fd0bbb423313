"""URL query string to navigation state codec."""

from periodical.navigation.codec import decode, decode_legacy_path, decode_url, encode, parse_query, to_url

__all__ = ["decode", "decode_legacy_path", "decode_url", "encode", "parse_query", "to_url"]
