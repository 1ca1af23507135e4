"""Exceptions raised by image2bytes"""


class Image2BytesError(Exception):
    """Base class for image2bytes errors"""


class DecodeError(Image2BytesError):
    """The input file could not be decoded as an image"""
