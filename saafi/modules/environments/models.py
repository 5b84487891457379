# Supabase table: environments
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- status: text (check: 'pending' | 'provisioning' | 'active' | 'failed' | 'terminated')
- cloud_provider: text (check: 'aws' | 'gcp')
- github_repo: text (nullable)
- owner_id: uuid (foreign key to auth.users.id, not null)
- created_at: timestamp (default: now())

Row-level security limits select/delete to owner_id = auth.uid().
Status is recorded as chosen by the caller; nothing drives transitions.
"""
