"""Configuração: settings por ambiente e logging estruturado."""
