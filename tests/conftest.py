import os

#As configurações exigem DATABASE_URL na importação
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.pop("SMTP_HOST", None)
