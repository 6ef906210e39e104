"""Input Adapters - HTTP (AWS Lambda Powertools)"""
