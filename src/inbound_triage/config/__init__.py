"""Configuração: logging estruturado e settings."""
