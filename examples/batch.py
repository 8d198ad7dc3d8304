"""Batch verification example for EmailListChecker SDK.

This example demonstrates:
- Submitting a batch with verify_batch()
- Polling progress with get_batch_status()
- Downloading results as JSON and CSV with get_batch_results()
- Backing off on rate limits using RateLimitError.retry_after
"""

import os
import time

from emaillistchecker import EmailListChecker, EmailListCheckerError, RateLimitError

API_KEY = os.getenv("EMAILLISTCHECKER_API_KEY", "your-api-key")

STATUS_ICONS = {
    "deliverable": "✓",
    "undeliverable": "✗",
    "risky": "⚠",
}


def wait_for_batch(client: EmailListChecker, batch_id: int, poll_interval: float = 2.0) -> dict:
    """Poll until the batch completes or fails."""
    previous_progress = None

    while True:
        try:
            status = client.get_batch_status(batch_id)
        except RateLimitError as e:
            print(f"Rate limited, waiting {e.retry_after}s...")
            time.sleep(e.retry_after)
            continue

        if status.get("progress") != previous_progress:
            print(
                f"Progress: {status.get('progress')}% "
                f"({status.get('processed_emails')}/{status.get('total_emails')} processed)"
            )
            previous_progress = status.get("progress")

        if status["status"] in ("completed", "failed"):
            return status

        time.sleep(poll_interval)


def batch_verification():
    """Submit a batch, follow it and download the results."""
    print("=" * 50)
    print("Batch Email Verification")
    print("=" * 50)

    emails = [
        "user1@example.com",
        "user2@example.com",
        "user3@example.com",
        "invalid@invalid-domain-xyz.com",
        "test@gmail.com",
    ]

    with EmailListChecker(api_key=API_KEY) as client:
        try:
            print(f"Submitting batch of {len(emails)} emails...")
            batch = client.verify_batch(emails, name="My Test Batch")

            print(f"Batch ID: {batch['id']}")
            print(f"Status: {batch['status']}")
            print(f"Total emails: {batch['total_emails']}\n")

            final = wait_for_batch(client, batch["id"])
            if final["status"] == "failed":
                print("Batch verification failed!")
                return

            print("\nFinal statistics:")
            print(f"  Valid: {final.get('valid_emails')}")
            print(f"  Invalid: {final.get('invalid_emails')}")
            print(f"  Unknown: {final.get('unknown_emails')}")

            print("\nResults:")
            for item in client.get_batch_results(batch["id"], format="json", filter="all"):
                icon = STATUS_ICONS.get(item["result"], "?")
                print(f"  {icon} {item['email']}: {item['result']} ({item.get('reason')})")

            # Non-JSON formats come back exactly as the API sends them
            csv_export = client.get_batch_results(batch["id"], format="csv", filter="valid")
            print(f"\nCSV export of valid emails:\n{csv_export}")

        except EmailListCheckerError as e:
            print(f"Error: {e.message}")
            if e.status_code:
                print(f"Status Code: {e.status_code}")


def manage_lists():
    """List batches and delete the oldest one."""
    print("\n" + "=" * 50)
    print("Verification Lists")
    print("=" * 50)

    with EmailListChecker(api_key=API_KEY) as client:
        lists = client.get_lists()
        for item in lists:
            print(f"  #{item['id']} {item.get('name')} ({item.get('status')})")

        if lists:
            confirmation = client.delete_list(lists[-1]["id"])
            print(f"Deleted: {confirmation}")


if __name__ == "__main__":
    batch_verification()
    manage_lists()
