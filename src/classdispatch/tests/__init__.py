from unittest import TestSuite


def test_suite():

    from classdispatch.tests import test_objects, test_strategy, test_dispatch

    tests = [
        test_objects.test_suite(),
        test_strategy.test_suite(),
        test_dispatch.test_suite(),
    ]

    return TestSuite(
        tests
    )
