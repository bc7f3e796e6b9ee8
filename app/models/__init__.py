# app/models/__init__.py
from .business import Business, BusinessAccount
from .document_transaction import DocumentTransaction
from .admin_user import AdminUser
