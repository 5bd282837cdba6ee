"""Compute: EC2, Auto Scaling, Lambda, Batch, Elastic Beanstalk and friends."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from ..core.aws_console import regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _ec2(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"ec2/home?region={arn.region}#{route}")


def _vpc(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"vpc/home?region={arn.region}#{route}")


def _autoscaling_group(arn: ParsedArn) -> str | None:
    # autoScalingGroup:<uuid>:autoScalingGroupName/<name>
    qualifiers = arn.qualifiers
    if len(qualifiers) < 2 or not qualifiers[1].startswith("autoScalingGroupName/"):
        return None
    name = qualifiers[1].split("/", 1)[1]
    return _ec2(arn, f"AutoScalingGroupDetails:id={name};view=details")


def _launch_configuration(arn: ParsedArn) -> str | None:
    # launchConfiguration:<uuid>:launchConfigurationName/<name>
    qualifiers = arn.qualifiers
    if len(qualifiers) < 2 or not qualifiers[1].startswith("launchConfigurationName/"):
        return None
    name = qualifiers[1].split("/", 1)[1]
    return _ec2(arn, f"LaunchConfigurations:launchConfigurationName={name}")


def _lambda_function(arn: ParsedArn) -> str:
    """Functions may be qualified with a version (``name:3``) or an alias (``name:live``).

    An empty qualifier (``name:``) links the unqualified function.
    """
    name, *qualifier = arn.qualifiers
    base = f"lambda/home?region={arn.region}#/functions/{name}"
    if not qualifier or not qualifier[0]:
        return regional_url(arn, base)
    if qualifier[0].isdigit():
        return regional_url(arn, f"{base}/versions/{qualifier[0]}")
    return regional_url(arn, f"{base}/aliases/{qualifier[0]}")


def _lambda_layer(arn: ParsedArn) -> str:
    qualifiers = arn.qualifiers
    version = qualifiers[1] if len(qualifiers) > 1 and qualifiers[1] else "1"
    return regional_url(arn, f"lambda/home?region={arn.region}#/layers/{qualifiers[0]}/versions/{version}")


def _batch(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"batch/home?region={arn.region}#{route}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "autoscaling": {  # Amazon EC2 Auto Scaling
        "autoScalingGroup": _autoscaling_group,
        "launchConfiguration": _launch_configuration,
    },
    "batch": {  # AWS Batch
        "compute-environment": lambda arn: _batch(arn, f"compute-environments/detail/{quote(arn.string, safe='')}"),
        "job": lambda arn: _batch(arn, f"jobs/detail/{arn.resource}"),
        "job-definition": lambda arn: _batch(arn, f"job-definition/detail/{quote(arn.string, safe='')}"),
        "job-queue": lambda arn: _batch(arn, f"queues/detail/{quote(arn.string, safe='')}"),
    },
    "ec2": {  # Amazon EC2 and Amazon VPC
        "capacity-reservation": lambda arn: _ec2(arn, f"CapacityReservationDetails:crId={arn.resource}"),
        "client-vpn-endpoint": None,
        "customer-gateway": lambda arn: _vpc(arn, f"CustomerGatewayDetails:customerGatewayId={arn.resource}"),
        "dedicated-host": lambda arn: _ec2(arn, f"HostDetails:hostId={arn.resource}"),
        "dhcp-options": lambda arn: _vpc(arn, f"DhcpOptionsDetails:DhcpOptionsId={arn.resource}"),
        "elastic-gpu": None,
        "elastic-ip": lambda arn: _ec2(arn, f"ElasticIpDetails:AllocationId={arn.resource}"),
        "fpga-image": None,
        "image": lambda arn: _ec2(arn, f"ImageDetails:imageId={arn.resource}"),
        "instance": lambda arn: _ec2(arn, f"InstanceDetails:instanceId={arn.resource}"),
        "internet-gateway": lambda arn: _vpc(arn, f"InternetGateway:internetGatewayId={arn.resource}"),
        "key-pair": None,
        "launch-template": lambda arn: _ec2(arn, f"LaunchTemplateDetails:launchTemplateId={arn.resource}"),
        "local-gateway": None,
        "local-gateway-route-table": None,
        "local-gateway-route-table-virtual-interface-group-association": None,
        "local-gateway-route-table-vpc-association": None,
        "local-gateway-virtual-interface": None,
        "local-gateway-virtual-interface-group": None,
        "natgateway": lambda arn: _vpc(arn, f"NatGatewayDetails:natGatewayId={arn.resource}"),
        "network-acl": lambda arn: _vpc(arn, f"NetworkAclDetails:networkAclId={arn.resource}"),
        "network-interface": lambda arn: _ec2(arn, f"NetworkInterface:networkInterfaceId={arn.resource}"),
        "placement-group": None,
        "reserved-instances": None,
        "route-table": lambda arn: _vpc(arn, f"RouteTableDetails:RouteTableId={arn.resource}"),
        "security-group": lambda arn: _vpc(arn, f"SecurityGroup:groupId={arn.resource}"),
        "snapshot": lambda arn: _ec2(arn, f"SnapshotDetails:snapshotId={arn.resource}"),
        "spot-instances-request": None,
        "subnet": lambda arn: _vpc(arn, f"SubnetDetails:subnetId={arn.resource}"),
        "traffic-mirror-filter": None,
        "traffic-mirror-filter-rule": None,
        "traffic-mirror-session": None,
        "traffic-mirror-target": None,
        "transit-gateway": lambda arn: _vpc(arn, f"TransitGatewayDetails:transitGatewayId={arn.resource}"),
        "transit-gateway-attachment": None,
        "transit-gateway-multicast-domain": None,
        "transit-gateway-route-table": None,
        "volume": lambda arn: _ec2(arn, f"VolumeDetails:volumeId={arn.resource}"),
        "vpc": lambda arn: _vpc(arn, f"VpcDetails:VpcId={arn.resource}"),
        "vpc-endpoint": lambda arn: _vpc(arn, f"EndpointDetails:vpcEndpointId={arn.resource}"),
        "vpc-endpoint-service": None,
        "vpc-flow-log": None,
        "vpc-peering-connection": lambda arn: _vpc(arn, f"PeeringConnectionDetails:VpcPeeringConnectionId={arn.resource}"),
        "vpn-connection": lambda arn: _vpc(arn, f"VpnConnectionDetails:VpnConnectionId={arn.resource}"),
        "vpn-gateway": None,
    },
    "elastic-inference": {  # Amazon Elastic Inference
        "elastic-inference-accelerator": None,
    },
    "elasticbeanstalk": {  # AWS Elastic Beanstalk
        "application": lambda arn: regional_url(
            arn, f"elasticbeanstalk/home?region={arn.region}#/application/overview?applicationName={arn.resource}"
        ),
        "applicationversion": None,
        "configurationtemplate": None,
        "environment": None,
        "platform": None,
        "solutionstack": None,
    },
    "gamelift": {  # Amazon GameLift
        "alias": None,
        "build": None,
        "fleet": None,
        "gamesessionqueue": None,
        "matchmakingconfiguration": None,
        "matchmakingruleset": None,
        "script": None,
    },
    "imagebuilder": {  # Amazon EC2 Image Builder
        "component": None,
        "distribution-configuration": None,
        "image": None,
        "image-pipeline": lambda arn: regional_url(
            arn, f"imagebuilder/home?region={arn.region}#/pipelines/{quote(arn.string, safe='')}"
        ),
        "image-recipe": None,
        "infrastructure-configuration": None,
    },
    "lambda": {  # AWS Lambda
        "event-source-mapping": None,
        "function": _lambda_function,
        "layer": _lambda_layer,
    },
    "lightsail": {  # Amazon Lightsail
        "CloudFormationStackRecord": None,
        "Disk": None,
        "DiskSnapshot": None,
        "Domain": None,
        "ExportSnapshotRecord": None,
        "Instance": None,
        "InstanceSnapshot": None,
        "KeyPair": None,
        "LoadBalancer": None,
        "LoadBalancerTlsCertificate": None,
        "PeeredVpc": None,
        "RelationalDatabase": None,
        "RelationalDatabaseSnapshot": None,
        "StaticIp": None,
    },
    "outposts": {  # AWS Outposts
        "order": None,
        "outpost": None,
        "site": None,
    },
}
