"""Pipeline steps package.

This package contains the steps of one generation cycle:
- request_builder: Composes the generation request from the email fields
- completion: Calls the external generation service
- response_splitter: Splits the completion into subject and body
- placeholder_tokenizer: Breaks subject and body into literal/placeholder segments
"""
