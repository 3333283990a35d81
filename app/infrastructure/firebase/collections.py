"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written. Business data lives in subcollections
of ``companyProfiles/{tenant_id}``; the profile document itself holds the
company details.

Example:
    db.collection(COLLECTION_COMPANY_PROFILES).document(tenant_id)
      .collection(COLLECTION_MATERIALS)
"""

# Root collections
COLLECTION_USERS = "users"
COLLECTION_USER_EMAILS = "user_emails"
COLLECTION_USED_RESET_TOKENS = "used_reset_tokens"
COLLECTION_COMPANY_PROFILES = "companyProfiles"

# Per-tenant subcollections
COLLECTION_MATERIALS = "materials"
COLLECTION_PURCHASE_INVOICES = "purchaseInvoices"
COLLECTION_SALE_INVOICES = "saleInvoices"
COLLECTION_SOURCES = "sources"
COLLECTION_SOURCE_COLLECTIONS = "sourceCollections"

# HR
COLLECTION_ASSOCIATES = "associates"
COLLECTION_VEHICLES = "vehicles"
COLLECTION_POSITIONS = "positions"
COLLECTION_COLLABORATORS = "collaborators"
COLLECTION_LOANS = "loans"
COLLECTION_ATTENDANCE = "attendance"

# Cash box (document ID is the UTC day, YYYY-MM-DD)
COLLECTION_CASH_BOXES = "cashBoxes"
