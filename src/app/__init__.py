"""App — contrato Sistema, sua implementação e a execução de demonstração.

Subpastas:
- bootstrap/: composition root (settings, logging)
- protocols/: contratos/interfaces
- domain/: implementações concretas dos contratos
- observability/: contexto de execução para logs estruturados

Padrão: app executa; config configura; utils apoia.
"""
