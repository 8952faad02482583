"""
Exceptions Package
Exception hierarchy shared by the view layer and the Jinja integration
"""
from larajinja.exceptions.custom import (
    FrameworkException,
    ViewException,
    DomainException,
    InvalidArgumentException,
    InvalidHelperException,
    RuntimeException,
    ServiceNotFoundException,
)

__all__ = [
    'FrameworkException',
    'ViewException',
    'DomainException',
    'InvalidArgumentException',
    'InvalidHelperException',
    'RuntimeException',
    'ServiceNotFoundException',
]
