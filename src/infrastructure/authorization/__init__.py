"""Authorization infrastructure package.

- model.conf: RBAC model definition
- policy.csv: Role privileges and role inheritance
- casbin_adapter.py: CasbinAdapter implementing AuthorizationProtocol
"""
