"""
Instance Info Node

A read-only REST endpoint that describes the EC2 instance it runs on,
using the local Instance Metadata Service (IMDSv2).
"""
__version__ = "1.0.0"
