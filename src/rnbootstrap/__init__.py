"""
RNBootstrap - React Native project generator.
"""
__version__ = "1.0.0"
