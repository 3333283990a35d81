"""Infrastructure adapters: Firestore, security, hosted model, templates."""
