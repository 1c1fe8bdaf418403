"""
/**
 * @file mandi_backend/__init__.py
 * @description Multilingual Mandi backend: translation proxy and mandi price feed.
 */
"""

__version__ = "0.1.0"
