"""Reader services — glue between navigation state, content and themes."""
