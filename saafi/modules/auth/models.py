# Supabase Auth
# Sign-in is delegated to GitHub OAuth through Supabase Auth.
# No custom tables are required - Supabase Auth handles:
# - The OAuth redirect and callback with GitHub
# - User records (auth.users table)
# - Session management and JWT issuance

"""
Supabase Auth provides:
- auth.sign_in_with_oauth() - Start the GitHub OAuth flow
- auth.get_user() - Resolve the user of the current session

The backend never issues tokens. It only verifies the HS256 access tokens
Supabase signs with the project's JWT secret; the caller's id is the "sub" claim.
"""
