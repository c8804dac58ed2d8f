"""Command line interface for the pbinfo client."""
