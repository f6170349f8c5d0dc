CREATE_SUBNET_SUBJECT = "network.create.aws"
CREATE_SUBNET_DONE_SUBJECT = f"{CREATE_SUBNET_SUBJECT}.done"
CREATE_SUBNET_ERROR_SUBJECT = f"{CREATE_SUBNET_SUBJECT}.error"

DEFAULT_ROUTE_CIDR_BLOCK = "0.0.0.0/0"
