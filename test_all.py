# test_all.py
# Runs the whole suite from the repo root: python test_all.py
import unittest


def load_tests(loader, tests, pattern):
    return loader.discover("tests", pattern="test_*.py")


if __name__ == "__main__":
    unittest.main(verbosity=2)
