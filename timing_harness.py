'''
Times zero-argument operations and prints the results as small text reports

Use
report = run_suite("Constant Suite", lambda: pv.is_prime_cached(), repetitions=5)
print(report)

Constant Suite
-----
[5.0] - From 1760000000.12 to 1760000005.12
[0.0] - From 1760000005.12 to 1760000005.12
...
-----
'''
import collections
import math
import sys
import time

DEFAULT_SUITE_NAME = 'A Test Suite'
SEPARATOR = '-----'


def truncate(x, places=2):
    ''' Drops digits past `places` by flooring, never rounding up '''
    scale = 10 ** places
    return math.floor(x * scale) / scale


class StdoutTee(object):
    ''' Collect everything written to stdout while still printing it '''
    def __init__(self):
        self.lines = []
        self._stdout = sys.stdout
        sys.stdout = self

    def release(self):
        sys.stdout = self._stdout

    def write(self, data):
        self.lines.append(data)
        return self._stdout.write(data)

    def flush(self):
        self._stdout.flush()


class Capturing(list):
    ''' Context manager for StdoutTee '''
    def __enter__(self):
        self.tee = StdoutTee()
        return self

    def __exit__(self, *args):
        self.tee.release()
        self.extend(self.tee.lines)


class TimingRecord(collections.namedtuple('TimingRecord', 'start_time end_time stdout')):
    __slots__ = ()

    def __new__(cls, start_time, end_time, stdout=''):
        return super(TimingRecord, cls).__new__(cls, start_time, end_time, stdout)

    @property
    def duration(self):
        return self.end_time - self.start_time

    def render(self):
        line = '[{}] - From {} to {}'.format(
            truncate(self.duration), truncate(self.start_time), truncate(self.end_time))
        if self.stdout:
            line += '\n :: ' + ' :: '.join(self.stdout.splitlines())
        return line


def run_timed(operation, capture_stdout=False):
    '''
    Calls operation() once between two wall-clock reads.
    Whatever operation returns is ignored; whatever it raises propagates.
    '''
    if not capture_stdout:
        start = time.time()
        operation()
        end = time.time()
        return TimingRecord(start, end)

    with Capturing() as captured:
        start = time.time()
        operation()
        end = time.time()
    return TimingRecord(start, end, ''.join(captured))


def render_report(name, records):
    lines = [name or DEFAULT_SUITE_NAME, SEPARATOR]
    lines.extend(record.render() for record in records)
    lines.append(SEPARATOR)
    return '\n'.join(lines)


class TimingReport(object):
    ''' A named, ordered collection of TimingRecords '''

    def __init__(self, name=None):
        self.name = name
        self.records = []

    def append(self, record):
        self.records.append(record)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, i):
        return self.records[i]

    def __str__(self):
        return render_report(self.name, self.records)


def run_suite(name, operation, repetitions=5, capture_stdout=False):
    report = TimingReport(name)
    for _ in range(repetitions):
        report.append(run_timed(operation, capture_stdout))
    return report
