"""
Static and demo data for OutVoice.

This package contains fixture data used to seed the ``demo`` store kind
for development and demonstrations.

Modules:
- demo_invoices: Pre-populated Invoice objects with realistic test data
"""
