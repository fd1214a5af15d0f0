"""Developer CLI for exercising forgetting_map caches."""

from __future__ import annotations

import logging
import random
import sys
import threading
from typing import List

import click

from .cache import LRUCache
from .config import CAPACITY_ENV_VAR, DEFAULT_CAPACITY
from .errors import InvalidArgumentError


def _consistency_problems(cache: LRUCache[int, str]) -> List[str]:
    problems: List[str] = []
    keys = cache.snapshot()
    size = cache.size
    if size > cache.capacity:
        problems.append(f"size {size} exceeds capacity {cache.capacity}")
    if len(keys) != size:
        problems.append(f"recency order holds {len(keys)} keys but size is {size}")
    if len(set(keys)) != len(keys):
        problems.append("recency order contains duplicate keys")
    missing = [key for key in keys if cache.find(key) is None]
    if missing:
        problems.append(f"{len(missing)} keys in recency order are not findable")
    return problems


def _worker(cache: LRUCache[int, str], seed: int, operations: int, keys: int, errors: List[Exception]) -> None:
    rng = random.Random(seed)
    try:
        for _ in range(operations):
            key = rng.randrange(keys)
            if rng.random() < 0.5:
                cache.add(key, f"v{key}")
            else:
                value = cache.find(key)
                if value is not None and value != f"v{key}":
                    raise AssertionError(f"key {key} returned foreign value {value!r}")
    except Exception as exc:  # reported by stress()
        errors.append(exc)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
def cli(log_level: str) -> None:
    """Forgetting map utilities."""

    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--capacity", default=5, show_default=True, type=int)
def demo(capacity: int) -> None:
    """Fill a cache past its capacity and show which key is forgotten."""

    try:
        cache: LRUCache[int, str] = LRUCache(capacity)
    except InvalidArgumentError as exc:
        raise click.ClickException(str(exc)) from exc

    for key in range(1, capacity + 1):
        cache.add(key, f"a{key}")
        click.echo(f"add({key}, 'a{key}') -> size={cache.size}")

    new_key = capacity + 1
    cache.add(new_key, f"a{new_key}")
    click.echo(f"add({new_key}, 'a{new_key}') -> size={cache.size}")
    for key in range(1, new_key + 1):
        click.echo(f"find({key}) -> {cache.find(key)!r}")
    click.echo(f"Most to least recently used: {cache.snapshot()}")


@cli.command()
@click.option("--capacity", envvar=CAPACITY_ENV_VAR, default=DEFAULT_CAPACITY, show_default=True, type=int)
@click.option("--threads", default=8, show_default=True, type=click.IntRange(min=1))
@click.option("--operations", default=10_000, show_default=True, type=click.IntRange(min=0), help="Operations per thread.")
@click.option("--keys", default=4096, show_default=True, type=click.IntRange(min=1), help="Size of the key space.")
@click.option("--seed", default=0, show_default=True, type=int)
def stress(capacity: int, threads: int, operations: int, keys: int, seed: int) -> None:
    """Hammer one cache from many threads, then verify its invariants."""

    try:
        cache: LRUCache[int, str] = LRUCache(capacity)
    except InvalidArgumentError as exc:
        raise click.ClickException(str(exc)) from exc

    errors: List[Exception] = []
    workers = [
        threading.Thread(target=_worker, args=(cache, seed + i, operations, keys, errors), daemon=True)
        for i in range(threads)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    click.echo(f"Threads: {threads}")
    click.echo(f"Operations: {threads * operations:,}")
    click.echo(f"Capacity: {cache.capacity}")
    click.echo(f"Size: {cache.size}")

    problems = [f"worker failed: {exc!r}" for exc in errors] + _consistency_problems(cache)
    if problems:
        for problem in problems:
            click.echo(f"FAIL: {problem}")
        sys.exit(1)
    click.echo("Cache is consistent.")


def main() -> None:
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
