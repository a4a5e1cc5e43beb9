"""Values carrying class vectors, and the implicit class of plain values

An 'Instance' pairs an arbitrary Python value with an ordered tuple of class
tags.  Any sequence of non-empty strings is a legal class vector: no
hierarchy is declared or checked, the order of the tags is all there is.

Plain Python values can be dispatched on too.  They have no explicit class
vector, only an implicit class derived from their type::

    >>> implicit_class(3)
    ('integer', 'numeric')
    >>> class_of(structure([1, 2], 'myclass'))
    ('myclass',)
"""

__all__ = [
    'Instance', 'structure', 'unclass', 'class_vector', 'implicit_class',
    'class_of', 'inherits', 'checkClassVector',
]

_implicit_by_type = [
    (bool,      ('logical',)),  # before int: bool is an int subclass
    (int,       ('integer', 'numeric')),
    (float,     ('double', 'numeric')),
    (complex,   ('complex',)),
    (str,       ('character',)),
    ((bytes, bytearray), ('raw',)),
    ((list, tuple, dict), ('list',)),
]


def checkClassVector(classes):
    """Return 'classes' as a tuple of tags, or raise if any tag is invalid"""

    if isinstance(classes, str):
        classes = (classes,)

    classes = tuple(classes)
    for tag in classes:
        if not isinstance(tag, str):
            raise TypeError("Class tags must be strings, not %r" % (tag,))
        if not tag:
            raise ValueError("Class tags must be non-empty")
    return classes


class Instance(object):

    """A value with an explicit, mutable class vector"""

    __slots__ = 'value', '_classes'

    def __init__(self, value=None, classes=()):
        self.value = value
        self._classes = checkClassVector(classes)

    def _getClasses(self):
        return self._classes

    def _setClasses(self, classes):
        self._classes = checkClassVector(classes)

    classes = property(_getClasses, _setClasses, doc=
        """The explicit class vector; assigning replaces it wholesale"""
    )

    @property
    def implicit(self):
        return implicit_class(self.value)

    def inherits(self, what, which=False):
        return inherits(self, what, which)

    def __repr__(self):
        return 'Instance(%r, classes=%r)' % (self.value, self._classes)


def structure(value, *classes):
    """Return an 'Instance' of 'value' with class vector 'classes'"""
    return Instance(value, classes)


def unclass(ob):
    """Return an 'Instance' over the same value with no explicit classes"""
    if isinstance(ob, Instance):
        return Instance(ob.value)
    return Instance(ob)


def class_vector(ob):
    """The explicit class vector of 'ob' (empty for plain values)"""
    if isinstance(ob, Instance):
        return ob.classes
    return ()


def implicit_class(value):
    """Class vector derived from the primitive representation of 'value'"""

    while isinstance(value, Instance):
        value = value.value

    if value is None:
        return ('NULL',)

    for types, classes in _implicit_by_type:
        if isinstance(value, types):
            return classes

    if callable(value):
        return ('function',)

    return (type(value).__name__,)


def class_of(ob):
    """The class vector as 'class()' reports it: explicit, else implicit"""
    return class_vector(ob) or implicit_class(ob)


def inherits(ob, what, which=False):
    """Does 'ob' have any of the classes named in 'what'?

    'what' is a tag or a sequence of tags.  With 'which' set, return a tuple
    giving, for each tag in 'what', its 1-based position in the class vector
    of 'ob' (0 when absent) instead of a truth value.
    """

    what = checkClassVector(what)
    classes = class_of(ob)

    if which:
        return tuple(
            [tag in classes and classes.index(tag) + 1 or 0 for tag in what]
        )

    for tag in what:
        if tag in classes:
            return True
    return False
