"""Thread Safety Example - Sharing a ProfileRegistry between threads.

Thread Safety:
    ProfileRegistry guards its cache with an RLock and a double-checked
    insert, so threads racing on an uncached (currency, locale) pair all
    receive the same profile. Profiles are immutable and detection keeps its
    scoreboard local, so both are safe to share.

Demonstrates:
1. Concurrent first requests observe a single profile
2. Concurrent detection against one injected registry

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed

from currencyinfo import ProfileRegistry, detect


def example_1_single_profile() -> None:
    """Example 1: Many threads, one derivation result."""
    print("=" * 60)
    print("Example 1: Concurrent First Requests")
    print("=" * 60)

    registry = ProfileRegistry()
    with ThreadPoolExecutor(max_workers=8) as executor:
        futures = [executor.submit(registry.get, "CAD", "fr-CA") for _ in range(32)]
        profiles = [future.result() for future in as_completed(futures)]

    print(f"Distinct profiles: {len({id(profile) for profile in profiles})}")
    # Output: Distinct profiles: 1
    print(registry.cache_info())


def example_2_concurrent_detection() -> None:
    """Example 2: Detection from worker threads with an injected registry."""
    print("\n" + "=" * 60)
    print("Example 2: Concurrent Detection")
    print("=" * 60)

    registry = ProfileRegistry()
    inputs = ["$1,234.56", "1 234,56 $", "$1", "CA$5.00", "nothing"]

    def run(text: str) -> str:
        result = detect(text, registry=registry)
        return f"{text!r} -> {result.currency + ' ' + result.locale if result else None}"

    with ThreadPoolExecutor(max_workers=4) as executor:
        for line in executor.map(run, inputs):
            print(line)


if __name__ == "__main__":
    example_1_single_profile()
    example_2_concurrent_detection()
