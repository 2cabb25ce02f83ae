"""Services Layer — multi-step operations that combine the store and peers."""
