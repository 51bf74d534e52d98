# modules/incident_blast/__init__.py
"""Incident blast module.

Notifies employees about an incident over WhatsApp.

Features:
- Recipient targeting (all employees, one department, or a hand-picked list)
- Gateway selection with fallback to another configured gateway
- Batched, paced delivery through infrastructure.notifications
- Blast history with per-recipient results
- HTTP API under /api/incident-blast
"""
