"""Generic function implementations"""

import logging
from contextvars import ContextVar
from functools import partial, update_wrapper

from classdispatch.interfaces import *
from classdispatch.objects import class_vector, implicit_class
from classdispatch.strategy import MethodTable, lookup_sequence, find_method
from classdispatch.strategy import wants_next_method

__all__ = [
    'DispatchState', 'DispatchResolver', 'GenericFunction', 'next_method',
    'current_state', 'default_resolver', 'generic', 'defmethod',
]

log = logging.getLogger(__name__)

_active = ContextVar('classdispatch.active', default=None)


class DispatchState(object):

    """Progress of one generic call through its lookup sequence

    'classes' is the lookup sequence frozen when the call was dispatched,
    and 'index' the position of the furthest method reached so far.  'object',
    'args' and 'kw' are handed, as-is, to every method in the chain.
    'live' is cleared when the 'dispatch()' call that created the state
    returns; a finished chain cannot be continued.
    """

    __slots__ = (
        'resolver', 'generic', 'classes', 'index', 'declared', 'object',
        'args', 'kw', 'live',
    )

    def __init__(self, resolver, generic, classes, index, declared, ob,
        args=(), kw=None
    ):
        self.resolver = resolver
        self.generic = generic
        self.classes = tuple(classes)
        self.index = index
        self.declared = tuple(declared)
        self.object = ob
        self.args = args
        self.kw = {} if kw is None else kw
        self.live = True

    @property
    def class_tag(self):
        """The class tag of the furthest method reached

        The index only moves forward, so once a 'next_method()' call returns
        this still names the method it reached, not the caller that is
        running again.
        """
        return self.classes[self.index]

    @property
    def remaining(self):
        """Tags after 'class_tag' (see its note on returning calls)"""
        return self.classes[self.index+1:]

    def __repr__(self):
        return 'DispatchState(%r, %r, index=%d)' % (
            self.generic, self.classes, self.index
        )


def current_state():
    """Return the active 'DispatchState', or 'None' outside a method"""
    return _active.get()


def _checkState(state):
    """Return 'state' (or the active state) if its chain can still continue"""
    if state is None:
        state = _active.get()
        if state is None:
            raise NoGenericInContext()
    elif not isinstance(state, DispatchState):
        raise TypeError("Expected a DispatchState, got %r" % (state,))
    if not state.live:
        raise NoGenericInContext(
            "next_method() called after the dispatch of %r returned"
            % state.generic
        )
    return state


def next_method(state=None):
    """Invoke the next applicable method of the active (or given) dispatch"""
    state = _checkState(state)
    return state.resolver.next_method(state)


class DispatchResolver(object):

    """Resolve generic calls against a 'MethodTable'

    Methods are looked up by walking the dispatched object's class vector
    from left to right, then (for primitive generics) its implicit class,
    then the 'default_tag'.  The first registered method wins; it may
    continue the walk with 'next_method()'.
    """

    def __init__(self, table=None, default_tag=DEFAULT):
        if table is None:
            table = MethodTable()
        self.table = table
        self.default_tag = default_tag

    def register(self, generic, class_tag, handle):
        self.table.register(generic, class_tag, handle)

    def unregister(self, generic, class_tag):
        self.table.unregister(generic, class_tag)

    def mark_primitive(self, generic):
        """Make 'generic' fall back to implicit classes before the default"""
        self.table.markPrimitive(generic)

    def is_primitive(self, generic):
        return self.table.isPrimitive(generic)

    def get_method(self, generic, class_tag, *default):
        """Return the method registered for exactly '(generic, class_tag)'"""
        try:
            return self.table[generic, class_tag]
        except KeyError:
            if default:
                return default[0]
            raise

    def methods(self, generic=None):
        """List the registered '(generic, class_tag)' pairs"""
        return [key for key, handle in self.table.items(generic)]

    def lookup_sequence(self, generic, ob):
        """Return the tuple of class tags a call of 'generic' on 'ob' tries"""
        if not isinstance(generic, str) or not generic:
            raise ValueError(
                "Generic function name must be a non-empty string: %r"
                % (generic,)
            )
        primitive = self.table.isPrimitive(generic)
        return lookup_sequence(
            class_vector(ob),
            primitive and implicit_class(ob) or (),
            primitive,
            self.default_tag,
        )

    def resolve(self, generic, ob):
        """Return '(class_tag, method)' that 'dispatch()' would invoke"""
        sequence = self.lookup_sequence(generic, ob)
        index, handle = find_method(self.table, generic, sequence)
        if handle is None:
            raise NoApplicableMethod(generic, class_vector(ob))
        return sequence[index], handle

    def dispatch(self, generic, ob, args=(), kw=None):
        """Call the first applicable method of 'generic' for 'ob'"""

        sequence = self.lookup_sequence(generic, ob)
        declared = class_vector(ob)
        index, handle = find_method(self.table, generic, sequence)

        if handle is None:
            raise NoApplicableMethod(generic, declared)

        log.debug("Dispatching %r on class %r", generic, sequence[index])
        state = DispatchState(
            self, generic, sequence, index, declared, ob, args, kw
        )
        try:
            return self._invoke(state, handle)
        finally:
            state.live = False

    def next_method(self, state=None):
        """Call the next applicable method after 'state.index'

        Without a 'state', continues the dispatch whose method is running.
        The state's own resolver (and so its table) does the walking.
        """
        state = _checkState(state)
        if state.resolver is not self:
            return state.resolver.next_method(state)

        index, handle = find_method(
            self.table, state.generic, state.classes, state.index+1
        )
        if handle is None:
            raise NoNextMethod(state.generic, state.classes[:state.index+1])

        log.debug("Continuing %r with class %r",
            state.generic, state.classes[index])
        state.index = index
        return self._invoke(state, handle)

    def _invoke(self, state, handle):
        token = _active.set(state)
        try:
            if wants_next_method(handle):
                return handle(
                    partial(self.next_method, state),
                    state.object, *state.args, **state.kw
                )
            return handle(state.object, *state.args, **state.kw)
        finally:
            _active.reset(token)


default_resolver = DispatchResolver()


class GenericFunction(object):

    """Function that delegates to a method chosen by its first argument

    The wrapped function only supplies a name and documentation; its body
    is never run.  Add methods with 'when()' or 'addMethod()'::

        @generic
        def describe(ob):
            '''Describe 'ob' in words'''

        @describe.when('default')
        def describe(ob):
            return 'something'
    """

    def __init__(self, func, resolver=None, primitive=False, name=None):
        if resolver is None:
            resolver = default_resolver
        self.resolver = resolver
        update_wrapper(self, func)
        self._lastMethod = None
        if name is not None:
            self.__name__ = name
        if primitive:
            resolver.mark_primitive(self.__name__)

    def __call__(self, ob, *args, **kw):
        return self.resolver.dispatch(self.__name__, ob, args, kw)

    def addMethod(self, class_tag, method):
        """Call 'method' for objects whose classes include 'class_tag'"""
        self.resolver.register(self.__name__, class_tag, method)

    def when(self, *class_tags):
        """Register the following function as a method for 'class_tags'

        Returns the generic function itself when the method has the same
        name, so the generic stays bound to that name in the caller::

            @describe.when('data.frame', 'list')
            def describe(ob):
                return 'a table'
        """
        if not class_tags:
            raise TypeError("when() requires at least one class tag")

        def decorate(method):
            if method is self:
                # stacked 'when()': reuse the method the inner one registered
                method = self._lastMethod
            elif isinstance(method, GenericFunction):
                raise TypeError(
                    "Can't register generic function %r as a method of %r"
                    % (method, self)
                )
            for tag in class_tags:
                self.addMethod(tag, method)
            if getattr(method, '__name__', None) == self.__name__:
                self._lastMethod = method
                return self
            return method

        return decorate

    def methods(self):
        """The class tags this generic has methods for"""
        return [tag for generic, tag in self.resolver.methods(self.__name__)]

    def __repr__(self):
        return '<GenericFunction %s>' % self.__name__


def generic(func=None, resolver=None, primitive=False, name=None):
    """Decorator: turn 'func' into a 'GenericFunction'

    Usable bare ('@generic') or with options
    ('@generic(primitive=True)').
    """
    if func is None:
        return lambda func: GenericFunction(func, resolver, primitive, name)
    return GenericFunction(func, resolver, primitive, name)


def defmethod(gf, class_tag, method):
    """Add 'method' to generic function 'gf' for 'class_tag'"""
    gf.addMethod(class_tag, method)
    return method
