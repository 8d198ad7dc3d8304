"""Email finder examples for EmailListChecker SDK."""

import os

from emaillistchecker import EmailListChecker, EmailListCheckerError

API_KEY = os.getenv("EMAILLISTCHECKER_API_KEY", "your-api-key")


def main():
    with EmailListChecker(api_key=API_KEY) as client:
        try:
            print("=== Find Email by Name ===")
            result = client.find_email("John", "Doe", "example.com")
            print(f"Email found: {result['email']}")
            print(f"Confidence: {result['confidence']}%")
            print(f"Pattern: {result['pattern']}")
            print(f"Verified: {'Yes' if result.get('verified') else 'No'}")
            for alt in result.get("alternatives", []):
                print(f"  - {alt}")

            print("\n=== Find Emails by Domain ===")
            domain_results = client.find_by_domain("example.com", limit=10)
            print(f"Domain: {domain_results['domain']}")
            print(f"Total found: {domain_results['total_found']}")
            for pattern in domain_results.get("patterns", []):
                print(f"  pattern: {pattern}")
            for email in domain_results.get("emails", []):
                print(f"  - {email['email']} (Last verified: {email.get('last_verified')})")

            print("\n=== Find Emails by Company ===")
            company_results = client.find_by_company("Acme Corporation", limit=10)
            print(f"Company: {company_results['company']}")
            print(f"Total found: {company_results['total_found']}")
            for domain in company_results.get("possible_domains", []):
                print(f"  domain: {domain}")
            for email in company_results.get("emails", []):
                print(f"  - {email['email']} ({email.get('domain')})")

        except EmailListCheckerError as e:
            print(f"Error: {e.message}")
            if e.status_code:
                print(f"Status Code: {e.status_code}")


if __name__ == "__main__":
    main()
