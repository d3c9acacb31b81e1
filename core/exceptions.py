#!/usr/bin/env python3
"""
Service layer exceptions.

The matcher itself never raises; these cover the services built around it.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class JobNotFoundException(ServiceException):
    """Raised when a requested job is not among the supplied postings."""
    pass


class NoJobsFoundException(ServiceException):
    """Raised when a skill gap analysis has no jobs to analyse."""
    pass


class SessionNotFoundException(ServiceException):
    """Raised when a chat session does not exist."""
    pass


class InvalidMessageException(ServiceException):
    """Raised when a chat message is blank or has an unknown role."""
    pass


class InvalidPolicyException(ServiceException):
    """Raised when result policy values are invalid."""
    pass


class SessionStoreException(ServiceException):
    """Raised when the session store backend fails."""
    pass


class InvalidSessionIdException(ServiceException):
    """Raised when a user or conversation id contains characters keys cannot hold."""
    pass
