"""Utilitários compartilhados (erros, sanitização)."""
