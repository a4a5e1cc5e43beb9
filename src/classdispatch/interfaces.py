"""Error kinds and constants shared by the dispatch framework"""

__all__ = [
    'DispatchError', 'NoApplicableMethod', 'NoNextMethod',
    'NoGenericInContext', 'DEFAULT',
]

DEFAULT = "default"


def _format_classes(classes):
    if len(classes) == 1:
        return '"%s"' % classes[0]
    return '"c(%s)"' % ', '.join(["'%s'" % tag for tag in classes])


class DispatchError(Exception):
    """Base class for errors raised while resolving a generic call"""


class NoApplicableMethod(DispatchError):
    """No method is registered for any class of the dispatched object"""

    def __init__(self, generic, classes):
        self.generic = generic
        self.classes = tuple(classes)
        DispatchError.__init__(self,
            "no applicable method for '%s' applied to %s" % (generic,
                self.classes and "an object of class %s"
                    % _format_classes(self.classes) or "an unclassed object"
            )
        )


class NoNextMethod(DispatchError):
    """'next_method()' ran out of classes to try"""

    def __init__(self, generic, classes):
        self.generic = generic
        self.classes = tuple(classes)
        DispatchError.__init__(self,
            "no more methods for '%s' after class %s"
            % (generic, _format_classes(self.classes))
        )


class NoGenericInContext(DispatchError):
    """'next_method()' was called outside of any method invocation"""

    def __init__(self, msg="next_method() called from outside a method dispatch"):
        DispatchError.__init__(self, msg)
