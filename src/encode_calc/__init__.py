"""Encode Calc - infer duration, bit rate or file size of encoded media."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("encode-calc")
except PackageNotFoundError:
    __version__ = "0.0.0.dev"

__author__ = "Encode Calc Team"
