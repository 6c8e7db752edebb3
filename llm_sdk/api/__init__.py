"""
One module per endpoint. Each holds the endpoint's enums, its request model
(with a builder and ``into_request``) and its response model.
"""
