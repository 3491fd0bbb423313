"""HTTP routes exposing resolved content to the presentation layer."""
