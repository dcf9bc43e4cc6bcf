"""Camada de aplicação: dispatch, bootstrap e observabilidade."""
