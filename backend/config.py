import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Shared secret for service tokens. Stub value, replace in deployments.
    JWT_SECRET = os.environ.get('JWT_SECRET') or 'stub-shared-secret-replace-in-deployments'
    JWT_ALGORITHM = os.environ.get('JWT_ALGORITHM', 'HS256')
    JWT_LEEWAY_SEC = int(os.environ.get('JWT_LEEWAY_SEC', '0'))
    # Default lifetime for tokens minted by the issue-token command (sec)
    TOKEN_TTL_SEC = int(os.environ.get('TOKEN_TTL_SEC', '86400'))
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173'
        ).split(',') if o.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
