"""Tests for class vectors and implicit classes"""

from unittest import TestCase, TestSuite, defaultTestLoader

from classdispatch.objects import *


class InstanceTests(TestCase):

    def testClassesAreTuples(self):
        ob = Instance([1, 2], ['b', 'a', 'b'])
        self.assertEqual(ob.classes, ('b', 'a', 'b'))

        ob.classes = ['x']
        self.assertEqual(ob.classes, ('x',))

        ob.classes = 'single'
        self.assertEqual(ob.classes, ('single',))

    def testEmptyClassVector(self):
        ob = Instance(42)
        self.assertEqual(ob.classes, ())
        self.assertEqual(class_vector(ob), ())
        self.assertEqual(class_of(ob), ('integer', 'numeric'))

    def testInvalidTags(self):
        self.assertRaises(TypeError, Instance, None, ['ok', 3])
        self.assertRaises(ValueError, Instance, None, ['ok', ''])
        ob = Instance(None, ['ok'])
        try:
            ob.classes = [None]
        except TypeError:
            pass
        else:
            raise AssertionError("Should've rejected a non-string tag")
        self.assertEqual(ob.classes, ('ok',))

    def testStructureAndUnclass(self):
        ob = structure({'a': 1}, 'myclass', 'list')
        self.assertEqual(ob.classes, ('myclass', 'list'))
        bare = unclass(ob)
        self.assertEqual(bare.classes, ())
        self.assertTrue(bare.value is ob.value)
        self.assertEqual(unclass(7).value, 7)

    def testPlainValuesHaveNoExplicitClasses(self):
        self.assertEqual(class_vector([1, 2]), ())
        self.assertEqual(class_of([1, 2]), ('list',))


class ImplicitClassTests(TestCase):

    def testPrimitiveValues(self):
        self.assertEqual(implicit_class(None), ('NULL',))
        self.assertEqual(implicit_class(True), ('logical',))
        self.assertEqual(implicit_class(1), ('integer', 'numeric'))
        self.assertEqual(implicit_class(1.5), ('double', 'numeric'))
        self.assertEqual(implicit_class(1j), ('complex',))
        self.assertEqual(implicit_class("a"), ('character',))
        self.assertEqual(implicit_class(b"a"), ('raw',))
        self.assertEqual(implicit_class(bytearray()), ('raw',))

    def testContainersAndFunctions(self):
        for value in ([], (), {}):
            self.assertEqual(implicit_class(value), ('list',))
        self.assertEqual(implicit_class(len), ('function',))
        self.assertEqual(implicit_class(lambda: None), ('function',))

    def testOtherTypesUseTheirName(self):
        class Widget(object):
            pass
        self.assertEqual(implicit_class(Widget()), ('Widget',))

    def testInstancesUseTheirValue(self):
        ob = Instance(Instance([1]), ['outer'])
        self.assertEqual(ob.implicit, ('list',))
        self.assertEqual(implicit_class(ob), ('list',))


class InheritsTests(TestCase):

    def testInherits(self):
        ob = structure(None, 'c', 'a')
        self.assertTrue(inherits(ob, 'a'))
        self.assertTrue(inherits(ob, ['zzz', 'c']))
        self.assertFalse(inherits(ob, 'b'))
        self.assertTrue(ob.inherits('c'))

    def testWhich(self):
        ob = structure(None, 'c', 'a')
        self.assertEqual(inherits(ob, ['a', 'b', 'c'], which=True), (2, 0, 1))

    def testImplicitClassCounts(self):
        self.assertTrue(inherits(3, 'numeric'))
        self.assertFalse(inherits(structure(3, 'money'), 'numeric'))


def test_suite():
    return TestSuite([
        defaultTestLoader.loadTestsFromTestCase(t)
        for t in (InstanceTests, ImplicitClassTests, InheritsTests)
    ])
