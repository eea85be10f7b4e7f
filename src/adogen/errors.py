"""Exception hierarchy for template resolution, authentication, and provisioning."""


class GeneratorError(Exception):
    """Base class for errors raised by adogen."""


class ConfigError(GeneratorError):
    pass


class CatalogMissing(GeneratorError):
    pass


class TemplateNotFound(GeneratorError):
    pass


class FolderMissing(TemplateNotFound):
    """The template name matched but its folder does not exist."""


class AuthFailure(GeneratorError):
    pass


class ValidationError(GeneratorError):
    pass


class ProvisioningFailure(GeneratorError):
    pass


class DevOpsApiError(GeneratorError):
    """A REST call to Azure DevOps returned a non-success status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
