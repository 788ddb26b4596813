from prime_memoization import PrimeValue
from timing_harness import run_suite

DEMO_VALUE = 12351315313
REPETITIONS = 5
DELAY_SECONDS = 5


def time_accessor(name, accessor, repetitions=REPETITIONS):
    print("Running {} ({} calls)".format(name, repetitions))
    return run_suite(name, accessor, repetitions)


def main():
    pv = PrimeValue(DEMO_VALUE, delay=DELAY_SECONDS)

    computed = time_accessor("Computed Suite", pv.is_prime_computed)
    constant = time_accessor("Constant Suite", pv.is_prime_cached)

    print(computed)
    print(constant)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
