"""
Thread-safety tests for the VariableStore.

Several writers set distinct names in the same scope while readers take
snapshots and point lookups; no write may be lost and readers only ever see
complete records.
"""

import threading

from scoped_variables import SecretScope, Variable, VariableStore


def test_concurrent_writers_do_not_lose_updates():
    variables = VariableStore({})
    writers, per_writer = 8, 250
    start = threading.Barrier(writers)

    def write(worker):
        start.wait()
        for i in range(per_writer):
            variables.set(f"w{worker}.v{i}", str(i), SecretScope.FINAL)

    threads = [threading.Thread(target=write, args=(w,)) for w in range(writers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert variables.count(SecretScope.FINAL) == writers * per_writer
    for w in range(writers):
        for i in range(per_writer):
            assert variables.get(f"W{w}.V{i}", SecretScope.FINAL) == str(i)


def test_readers_see_complete_variables_during_writes():
    variables = VariableStore({SecretScope.FINAL: {"counter": "0"}})
    stop = threading.Event()
    errors = []

    def write():
        for i in range(500):
            variables.set("counter", str(i), SecretScope.FINAL)
            variables.set(f"extra{i}", "x", SecretScope.FINAL)
        stop.set()

    def read():
        while not stop.is_set():
            value = variables.get("counter", SecretScope.FINAL)
            if value is None or not value.isdigit():
                errors.append(value)
            for variable in variables.all_variables:
                if not isinstance(variable, Variable) or variable.value is None:
                    errors.append(variable)

    readers = [threading.Thread(target=read) for _ in range(4)]
    writer = threading.Thread(target=write)
    for t in readers:
        t.start()
    writer.start()
    writer.join()
    for t in readers:
        t.join()

    assert errors == []
    assert variables.get_int("counter") == 499
