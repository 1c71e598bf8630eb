"""Async usage example for the Prodia client."""

import asyncio
from pathlib import Path

from prodia_client import AsyncProdiaClient, ProdiaClientError


async def main():
    """Generate several images concurrently."""

    prompts = [
        "lighthouse at dusk",
        "fox in a birch forest",
        "city skyline in the rain",
    ]

    # Stop waiting on 429s after ten tries per job
    async with AsyncProdiaClient(max_retries=10) as client:
        tasks = [
            client.job(
                {"type": "inference.flux.schnell.txt2img.v1", "config": {"prompt": prompt}},
                {"accept": "image/png"},
            )
            for prompt in prompts
        ]

        results = await asyncio.gather(*tasks, return_exceptions=True)

        print("\nResults:")
        for index, (prompt, result) in enumerate(zip(prompts, results)):
            if isinstance(result, ProdiaClientError):
                print(f"✗ {prompt}: {result}")
                continue
            path = Path(f"image_{index}.png")
            path.write_bytes(await result.aread())
            print(f"✓ {prompt}: {path}")


if __name__ == "__main__":
    asyncio.run(main())
