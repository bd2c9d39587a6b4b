"""Clientes service: bearer-token login and in-memory customer CRUD."""
