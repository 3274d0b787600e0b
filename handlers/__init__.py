"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives a command, checks who is
calling, delegates to LedgerService, and sends the response back.
No balance arithmetic lives here.
"""
