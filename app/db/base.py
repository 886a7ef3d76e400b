# app/db/base.py
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Largest value an INTEGER primary key can hold (signed 64-bit)
MAX_ID = 2**63 - 1
