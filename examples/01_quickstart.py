from __future__ import annotations

import asyncio
import logging

from kungfu import Error, Ok

from aiterate import IterationPolicy, for_each, map_each, reduce, transform


async def fetch_price(sku: str) -> float:
    # Stand-in for an I/O call: one awaitable per element.
    await asyncio.sleep(0.01)
    return {"apple": 0.5, "pear": 0.75, "plum": 0.25}[sku]


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    basket = {"apple": 4, "pear": 2, "plum": 10}

    await for_each(basket, lambda qty, sku, _: print(f"{sku:>6} x{qty}"))

    prices = await map_each(basket, lambda qty, sku, _: fetch_price(sku))
    print("prices:", prices.unwrap())

    async def add_line(total: float, qty: int, sku: str, _: object) -> float:
        return total + qty * await fetch_price(sku)

    total = await reduce(basket, add_line, 0.0, policy=IterationPolicy.with_delay(0.001))
    print(f"total: {total.unwrap():.2f}")

    def restock(acc: dict[str, int], qty: int, sku: str, _: object) -> None:
        if qty < 5:
            acc[sku] = 5 - qty

    match await transform(basket, restock):
        case Ok(orders):
            print("restock:", orders)
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    asyncio.run(main())
