"""Method storage and lookup strategies

    MethodTable -- mapping from '(generic, class_tag)' pairs to method
        handles, plus the set of generics marked primitive

    lookup_sequence -- build the ordered tuple of class tags a generic call
        will try

    find_method -- scan a lookup sequence for the first registered method

    wants_next_method -- does a method expect a 'next_method' continuation
        as its first argument?
"""

import inspect, logging
from threading import Lock

from classdispatch.interfaces import DEFAULT

__all__ = [
    'MethodTable', 'lookup_sequence', 'find_method', 'wants_next_method',
]

log = logging.getLogger(__name__)


class MethodTable(object):

    """Registry of methods keyed by '(generic, class_tag)'

    Writes are serialized by a lock; lookups are not, so registration is
    expected to finish before dispatching starts on other threads.
    """

    def __init__(self):
        self.__lock = Lock()
        self.clear()

    def clear(self):
        self.__lock.acquire()
        try:
            self._methods = {}
            self._primitives = set()
        finally:
            self.__lock.release()

    def register(self, generic, class_tag, handle):
        """Use 'handle' for calls of 'generic' on objects of 'class_tag'"""

        _checkName(generic, "Generic function name")
        _checkName(class_tag, "Class tag")
        if not callable(handle):
            raise TypeError("Method for %r must be callable: %r"
                % (generic, handle))

        key = generic, class_tag
        self.__lock.acquire()
        try:
            if key in self._methods:
                log.debug("Replacing method for %r on class %r", *key)
                # re-insert so the pair moves to the end of 'items()'
                del self._methods[key]
            self._methods[key] = handle
        finally:
            self.__lock.release()

    def unregister(self, generic, class_tag):
        """Remove the method for 'generic' on 'class_tag'"""
        self.__lock.acquire()
        try:
            del self._methods[generic, class_tag]
        finally:
            self.__lock.release()

    def markPrimitive(self, generic):
        _checkName(generic, "Generic function name")
        self.__lock.acquire()
        try:
            self._primitives.add(generic)
        finally:
            self.__lock.release()
        log.debug("Marked %r as a primitive generic", generic)

    def isPrimitive(self, generic):
        return generic in self._primitives

    def get(self, generic, class_tag, default=None):
        return self._methods.get((generic, class_tag), default)

    def __getitem__(self, key):
        return self._methods[key]

    def __contains__(self, key):
        return key in self._methods

    def __len__(self):
        return len(self._methods)

    def items(self, generic=None):
        """List '((generic, class_tag), handle)' pairs, oldest first"""
        items = list(self._methods.items())
        if generic is None:
            return items
        return [(key, handle) for key, handle in items if key[0] == generic]


def _checkName(name, what):
    if not isinstance(name, str):
        raise TypeError("%s must be a string, not %r" % (what, name))
    if not name:
        raise ValueError("%s must be non-empty" % what)


def lookup_sequence(classes, implicit=(), primitive=False, default=DEFAULT):
    """Return the tuple of class tags a generic call should try, in order

    The declared 'classes' come first, exactly as given.  Primitive generics
    then try any 'implicit' classes not already present.  The 'default' tag
    always comes last.
    """

    sequence = list(classes)

    if primitive:
        for tag in implicit:
            if tag not in sequence:
                sequence.append(tag)

    sequence.append(default)
    return tuple(sequence)


def find_method(table, generic, sequence, start=0):
    """Return '(index, handle)' of the first method at or after 'start'

    Returns '(None, None)' if no tag in 'sequence[start:]' has a method.
    """
    for index in range(start, len(sequence)):
        handle = table.get(generic, sequence[index])
        if handle is not None:
            return index, handle
    return None, None


def wants_next_method(method):
    """True if 'method' takes a 'next_method' continuation first"""
    try:
        params = list(inspect.signature(method).parameters.values())
    except (TypeError, ValueError):
        return False    # not introspectable, therefore not chainable

    return bool(params) and params[0].name == 'next_method' and \
        params[0].kind in (params[0].POSITIONAL_ONLY,
            params[0].POSITIONAL_OR_KEYWORD)
