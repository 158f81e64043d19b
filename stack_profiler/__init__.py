"""Deployment timing report for CloudFormation stacks."""

__version__ = "1.0.0"
