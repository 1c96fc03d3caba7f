"""Data-access layer and HTTP API for a food-sharing app backed by Supabase."""
