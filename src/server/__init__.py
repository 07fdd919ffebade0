"""HTTP server exposing the substitution proxy."""
