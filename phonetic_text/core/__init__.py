"""Core conversion pipeline: classification and the encoder/decoder.

Pure functions over immutable tables. Nothing in this package touches
the environment, the filesystem or stdout.
"""
