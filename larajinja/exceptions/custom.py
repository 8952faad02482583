"""
Custom Exception Classes
View-layer exceptions raised by the renderer, the helper registries and the service factories
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all larajinja exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ViewException(FrameworkException):
    """Base exception for errors raised while rendering views"""
    message = "View rendering failed"


class DomainException(ViewException):
    """
    Domain exception

    Raised when a value is valid in type but makes no sense for the view layer

    Example:
        raise DomainException("received View Model argument, but template is empty")
    """
    message = "Invalid view state"


class InvalidArgumentException(ViewException):
    """
    Invalid argument exception

    Raised when a collaborator (loader, resolver, helper) has the wrong type

    Example:
        raise InvalidArgumentException('Jinja loader must be a ChainLoader; got type "DictLoader" instead')
    """
    message = "Invalid argument"


class InvalidHelperException(InvalidArgumentException):
    """Raised when a helper registry produces something that is not a helper"""
    message = "Invalid view helper"


class RuntimeException(ViewException):
    """
    Runtime exception

    Raised when configuration cannot be turned into working services

    Example:
        raise RuntimeException("Unable to resolve provided configuration")
    """
    message = "View runtime error"


class ServiceNotFoundException(ViewException):
    """
    Service not found exception

    Raised when a helper name is not registered in any helper registry
    """
    message = "Service not found"
