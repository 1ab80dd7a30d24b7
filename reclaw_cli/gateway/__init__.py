"""
Gateway request/response contract.

Leaf-first:
- envelope: Command -> OutboundRequest (method, path, JSON body)
- client: OutboundRequest -> RawResponse over HTTP (httpx)
- validator: RawResponse -> Outcome per command kind
- dispatcher: Command -> Outcome, one request per invocation
"""
