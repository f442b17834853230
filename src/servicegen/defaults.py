DEFAULT_ATTRIBUTE_NAME = "ServiceGen.ServiceRegistrationAttribute"

DEFAULT_CONTAINER_TYPE_NAME = "Microsoft.Extensions.DependencyInjection.IServiceCollection"

DEFAULT_CONTAINER_NAMESPACE = "Microsoft.Extensions.DependencyInjection"

DEFAULT_IGNORED_INTERFACES: tuple[str, ...] = (
    "System.IDisposable",
    "System.IAsyncDisposable",
)

DEFAULT_HINT_NAME_SUFFIX = ".g.cs"

IGNORE_INTERFACE_OPTION_KEY = "build_property.ServiceRegistrationIgnoreInterface"
