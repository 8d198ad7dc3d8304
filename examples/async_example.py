"""Async example for EmailListChecker SDK.

This example demonstrates async/await usage with the AsyncEmailListChecker client:
- Concurrent verification of multiple emails
- Concurrent credits and usage lookups
- Async batch submission with caller-driven polling
"""

import asyncio
import os

from emaillistchecker import (
    AsyncEmailListChecker,
    EmailListCheckerError,
    RateLimitError,
    ValidationError,
)

API_KEY = os.getenv("EMAILLISTCHECKER_API_KEY", "your-api-key")


async def concurrent_verification_example():
    """Verify multiple emails concurrently."""
    print("=" * 50)
    print("Concurrent Email Verification")
    print("=" * 50)

    emails = [
        "user1@example.com",
        "user2@example.com",
        "test@gmail.com",
        "info@company.com",
    ]

    async with AsyncEmailListChecker(api_key=API_KEY) as client:
        results = await asyncio.gather(
            *(client.verify(email) for email in emails),
            return_exceptions=True,  # Don't fail all if one fails
        )

        for email, result in zip(emails, results):
            if isinstance(result, RateLimitError):
                print(f"  {email}: rate limited, retry after {result.retry_after}s")
            elif isinstance(result, EmailListCheckerError):
                print(f"  {email}: error - {result.message}")
            else:
                print(f"  {email}: {result['result']} (score: {result['score']})")


async def credits_and_usage_example():
    """Fetch credits and usage concurrently."""
    print("\n" + "=" * 50)
    print("Async Credits and Usage")
    print("=" * 50)

    async with AsyncEmailListChecker(api_key=API_KEY) as client:
        credits, usage = await asyncio.gather(client.get_credits(), client.get_usage())

        print(f"Balance: {credits['balance']} ({credits['plan']})")
        print(f"Requests: {usage['total_requests']} total, {usage['failed_requests']} failed")


async def batch_example():
    """Submit a batch and poll until it finishes."""
    print("\n" + "=" * 50)
    print("Async Batch Verification")
    print("=" * 50)

    async with AsyncEmailListChecker(api_key=API_KEY) as client:
        try:
            batch = await client.verify_batch(
                ["user1@example.com", "user2@example.com"],
                name="Async batch",
            )
            print(f"Batch {batch['id']} submitted")

            while True:
                status = await client.get_batch_status(batch["id"])
                print(f"  {status['status']}: {status.get('progress', 0)}%")
                if status["status"] in ("completed", "failed"):
                    break
                await asyncio.sleep(2)

            if status["status"] == "completed":
                results = await client.get_batch_results(batch["id"], filter="valid")
                print(f"Valid emails: {len(results)}")

        except ValidationError as e:
            print(f"Validation error: {e.message}")


async def main():
    await concurrent_verification_example()
    await credits_and_usage_example()
    await batch_example()


if __name__ == "__main__":
    asyncio.run(main())
