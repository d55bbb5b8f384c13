# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
exception - csinode public errors

Every error carries the gRPC status code the CSI caller should report for it,
so a server can convert any error raised by this package using info() or
response() without knowing the concrete type.
"""

# gRPC status codes used by the CSI node service.
OK = 0
INVALID_ARGUMENT = 3
NOT_FOUND = 5
ABORTED = 10
INTERNAL = 13


class CsiNodeException(Exception):
    code = INTERNAL
    message = "CSI node exception"

    # A flag that is used to mark expected errors. Setting this to True will
    # suppress error logs for the exception. Errors that are always caller
    # errors should override this to True.
    expected = False

    def __str__(self):
        return self.message

    def info(self):
        return {'code': self.code, 'message': str(self)}

    def response(self):
        return {'status': self.info()}


class ContextException(CsiNodeException):
    """
    Adds reason and context arguments for better error messages.

    Use keyword arguments to describe the failure::

        raise InvalidAttribute("invalid port number", port="abc")
    """

    context = None

    def __init__(self, reason=None, **kwargs):
        self.context = kwargs
        if reason:
            self.context["reason"] = reason

    def __str__(self):
        if self.context:
            return "%s: %s" % (self.message, self.context)
        else:
            return self.message


#################################################
# Validation errors
#################################################

class InvalidArgument(ContextException):
    code = INVALID_ARGUMENT
    message = "Invalid argument"
    expected = True


class InvalidCapacityRange(InvalidArgument):
    message = "Invalid capacity range"


class CapacityExceeded(InvalidArgument):
    message = "Capacity exceeds maximum supported volume size"


class InvalidAttribute(InvalidArgument):
    message = "Invalid volume attribute"


class InvalidPerformanceLevel(InvalidArgument):
    message = "Invalid performance option"


class AddressFamilyError(InvalidArgument):
    message = "Address is not in the expected IP family"


#################################################
# Lookup errors
#################################################

class AttributeNotFound(ContextException):
    code = NOT_FOUND
    message = "Required attribute not found"
    expected = True


#################################################
# Concurrency errors
#################################################

class VolumeOperationInProgress(ContextException):
    code = ABORTED
    message = "An operation for the volume is already in progress"
    expected = True
