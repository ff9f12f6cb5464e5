"""
Resolve the application and deployment a detail page refers to.
"""

from collections.abc import Mapping

from aws_lambda_powertools import Logger

from serve_replicas.core.models.errors import NotFoundError
from serve_replicas.core.models.replica import ServeApplication, ServeDeployment
from serve_replicas.core.utils.constants import (
    ERROR_CODE_APPLICATION_NOT_FOUND,
    ERROR_CODE_DEPLOYMENT_NOT_FOUND,
)

logger = Logger(UTC=True)


def resolve_deployment(
    applications: Mapping[str, ServeApplication],
    application_name: str,
    deployment_name: str,
) -> tuple[ServeApplication, ServeDeployment]:
    """
    Find a deployment in already-fetched application data.

    Args:
        applications: Applications keyed by name
        application_name: Name of the application owning the deployment
        deployment_name: Name of the deployment to show

    Returns:
        The (application, deployment) pair

    Raises:
        NotFoundError: If either the application or the deployment is missing
    """
    application = applications.get(application_name)
    if application is None:
        logger.warning(
            "Application not found",
            extra={"application_name": application_name},
        )
        raise NotFoundError(
            message=f'Application with name "{application_name}" not found.',
            error_code=ERROR_CODE_APPLICATION_NOT_FOUND,
            details={"application_name": application_name},
        )

    deployment = application.deployments.get(deployment_name)
    if deployment is None:
        logger.warning(
            "Deployment not found",
            extra={
                "application_name": application_name,
                "deployment_name": deployment_name,
            },
        )
        raise NotFoundError(
            message=f'Deployment with name "{deployment_name}" not found.',
            error_code=ERROR_CODE_DEPLOYMENT_NOT_FOUND,
            details={
                "application_name": application_name,
                "deployment_name": deployment_name,
            },
        )

    return application, deployment
