"""Basic usage examples for EmailListChecker SDK.

This example demonstrates:
- Single email verification using verify()
- Getting credits with get_credits() and usage with get_usage()
- Handling the SDK exceptions
"""

import os

from emaillistchecker import (
    AuthenticationError,
    EmailListChecker,
    EmailListCheckerError,
    InsufficientCreditsError,
    RateLimitError,
    TransportError,
    ValidationError,
)

# Get API key from environment variable
API_KEY = os.getenv("EMAILLISTCHECKER_API_KEY", "your-api-key")


def single_email_verification():
    """Verify a single email address."""
    print("=" * 50)
    print("Single Email Verification")
    print("=" * 50)

    client = EmailListChecker(api_key=API_KEY)

    try:
        result = client.verify(
            email="test@example.com",
            smtp_check=True,  # Optional: perform SMTP verification
        )

        print(f"Email: {result['email']}")
        print(f"Result: {result['result']}")  # deliverable, undeliverable, risky, unknown
        print(f"Reason: {result['reason']}")
        print(f"Score: {result['score']}")
        print(f"Disposable: {'Yes' if result.get('disposable') else 'No'}")
        print(f"Role-based: {'Yes' if result.get('role') else 'No'}")
        print(f"Free provider: {'Yes' if result.get('free') else 'No'}")
        print(f"SMTP Provider: {result.get('smtp_provider')}")
        print(f"Domain: {result.get('domain')}")

        if result.get("mx_records"):
            print(f"MX Records: {', '.join(result['mx_records'])}")

    except AuthenticationError:
        print("Error: Invalid API key")
    except ValidationError as e:
        print(f"Error: Invalid input - {e.message}")
    except TransportError as e:
        print(f"Error: Could not reach the API - {e.message}")

    finally:
        client.close()


def credits_and_usage_example():
    """Get credit balance and usage statistics."""
    print("\n" + "=" * 50)
    print("Credits and Usage")
    print("=" * 50)

    with EmailListChecker(api_key=API_KEY) as client:
        try:
            credits = client.get_credits()
            print(f"Available credits: {credits['balance']}")
            print(f"Used this month: {credits['used_this_month']}")
            print(f"Current plan: {credits['plan']}")

            usage = client.get_usage()
            print(f"\nTotal API requests: {usage['total_requests']}")
            print(f"Successful requests: {usage['successful_requests']}")
            print(f"Failed requests: {usage['failed_requests']}")

            # The service does not return a success rate
            if usage["total_requests"] > 0:
                success_rate = usage["successful_requests"] / usage["total_requests"] * 100
                print(f"Success rate: {success_rate:.2f}%")

        except AuthenticationError:
            print("Error: Invalid API key")


def error_handling_example():
    """Demonstrate error handling."""
    print("\n" + "=" * 50)
    print("Error Handling")
    print("=" * 50)

    with EmailListChecker(api_key=API_KEY) as client:
        try:
            # Out of range timeout, rejected by the API
            client.verify("user@example.com", timeout=120)

        except ValidationError as e:
            print(f"ValidationError caught: {e.message}")
        except RateLimitError as e:
            print(f"RateLimitError caught: Retry after {e.retry_after} seconds")
        except InsufficientCreditsError:
            print("Error: Not enough credits")

        try:
            client.get_credits()

        except EmailListCheckerError as e:
            # Catch the base class and branch on the kind
            print(f"{e.kind.value} error: {e.message} (status: {e.status_code})")


if __name__ == "__main__":
    single_email_verification()
    credits_and_usage_example()
    error_handling_example()
