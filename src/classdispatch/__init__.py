"""Class-Vector Generic Function Dispatch

 Single dispatch in the style of S3: every object carries an ordered vector
 of class tags, and a generic function picks the method registered for the
 first tag it finds, falling back to a method registered for "default".  A
 method can hand the call on to the next matching tag with 'next_method()'.

 There is no class hierarchy.  "Inheritance" is nothing more than the order
 in which whoever built the object listed its tags, so the same tag may mean
 different things to different objects, and changing the order changes the
 method that runs.

 Generics marked "primitive" also consider the implicit class of the
 object's underlying value (e.g. "integer", "list") before "default".

 Example::

    from classdispatch import generic, next_method, structure

    @generic
    def greet(ob):
        '''Say hello'''

    @greet.when('child')
    def greet(ob):
        return 'hi! ' + next_method()

    @greet.when('parent')
    def greet(ob):
        return 'hello'

    greet(structure(None, 'child', 'parent'))   # -> 'hi! hello'
"""

from classdispatch.interfaces import *
from classdispatch.objects import *
from classdispatch.strategy import MethodTable
from classdispatch.functions import *
