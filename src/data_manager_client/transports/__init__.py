# Data Manager Client
# File: transports/__init__.py
# Version: v1
