"""Built-in sample catalog used when no catalog file is configured."""

from knowledge_search.data import Article, Catalog

SAMPLE_ARTICLES: tuple[Article, ...] = (
    Article(
        id="KB-1001",
        title="Password Reset (Agents)",
        summary="How agents can reset their password in under 2 minutes.",
        body=(
            "1) Go to the login page\n"
            '2) Click "Forgot Password"\n'
            "3) Follow the email link\n"
            "4) Set a new password"
        ),
        tags=("login", "password", "agents"),
    ),
    Article(
        id="KB-1002",
        title="Refund Policy Overview",
        summary="Quick overview of refund eligibility and timelines.",
        body=(
            "Refunds are allowed within 30 days of purchase.\n"
            "Digital goods are non-refundable unless defective.\n"
            "Refund processing takes 5–7 business days."
        ),
        tags=("refund", "billing", "policy"),
    ),
    Article(
        id="KB-1003",
        title="Shipping Delay Escalation",
        summary="What to do when an order is delayed more than 7 days.",
        body=(
            "1) Confirm the tracking number\n"
            "2) Check carrier status\n"
            "3) If delay > 7 days, escalate to Tier 2\n"
            "4) Offer apology + coupon if applicable"
        ),
        tags=("shipping", "delay", "escalation"),
    ),
    Article(
        id="KB-1004",
        title="How to Update Customer Email",
        summary="Steps to update the email address in CRM.",
        body=(
            "1) Open the customer profile\n"
            "2) Click Edit\n"
            "3) Replace email\n"
            "4) Save and confirm via verification email"
        ),
        tags=("crm", "email", "customer"),
    ),
)


def sample_catalog() -> Catalog:
    """Return the built-in four-article catalog."""
    return Catalog(SAMPLE_ARTICLES)
