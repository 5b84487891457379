# Supabase table: blueprints
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- description: text (nullable)
- cloud_provider: text (check: 'aws' | 'gcp')
- category: text (nullable)
- cost_estimate: numeric (nullable)
- compliance_tags: text[] (default: '{}')
- version: text (nullable)
- created_at: timestamp (default: now())

Blueprints are never deleted. Column defaults and constraints are the only
write validation; the service forwards whatever fields the caller sent.
"""
