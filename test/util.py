import time

from chordfinder.util import log

global_init_time = time.time()


class TestSuite:
    __test__ = False # not a test class itself, despite the name

    def __init__(self, silent=False, graceful=False):
        self.silent = silent
        self.graceful = graceful

    def __call__(self, op, exp):
        ### test output of an operation against its expected value
        start_time = time.time()

        if type(exp) == float:
            assert type(op) == float
            result = abs(op - exp) < 1e-10
        else:
            result = (op == exp)

        finished_time = time.time()
        wall_time = start_time - global_init_time
        exec_time_ms = (finished_time - start_time) * 1000.

        resultstr = 'TEST +++ PASS' if result else 'TEST --- FAIL'
        if not self.silent:
            print(f'[{wall_time:.06f}] {resultstr}:\n obs: {op}\n exp: {exp}\n   (execution time: {exec_time_ms:.04f}ms)\n')

        if not result and not self.graceful:
            raise AssertionError(f'Test failed: observed {op}, expected {exp}')

compare = TestSuite(silent=False)
