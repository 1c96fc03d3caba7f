"""Supabase implementations of the service ports."""
