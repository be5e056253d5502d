from dependency_injector import containers, providers
from core.config.settings import settings
from upstream.github.client import HaystackGitHubClient, build_github


class AppContainer(containers.DeclarativeContainer):

    github = providers.Singleton(
        build_github,
        token=settings.GITHUB_PERSONAL_ACCESS_TOKEN,
        timeout=settings.GITHUB_TIMEOUT,
    )

    haystack_client = providers.Singleton(
        HaystackGitHubClient,
        github=github,
    )
