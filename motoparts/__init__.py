"""MotoParts storefront backend."""
