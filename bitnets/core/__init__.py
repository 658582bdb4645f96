"""
Contains the core elements that are used within bitnets

Core:
    -Provides the reference constants for network descriptors
    -Provides custom exceptions for the registry and its helpers
    -Provides the logger factory
"""
# core/__init__.py
from bitnets.core.exceptions import *
from bitnets.core.formats import *
from bitnets.core.logging import *
