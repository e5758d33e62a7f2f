"""
Project generation pipeline.

Runs the stages strictly in order:

    prompts -> bootstrap -> template -> dependencies -> iOS pods -> package.json

Any exception moves the run to FAILED and is re-raised; nothing is retried
or rolled back.
"""
import enum
import os

from .config import TEMPLATE_DIR, settings
from .dependencies import install_dependencies, plan_dependencies
from .manifest import finalize_manifest
from .platform_setup import install_ios_pods
from .project import initialize_project
from .prompts import collect_choices
from .runner import run_command
from .template import compose_template


class Stage(enum.Enum):
    IDLE = "idle"
    PROMPTS_COLLECTED = "prompts_collected"
    PROJECT_INITIALIZED = "project_initialized"
    FILES_COMPOSED = "files_composed"
    DEPENDENCIES_INSTALLED = "dependencies_installed"
    PLATFORM_CONFIGURED = "platform_configured"
    MANIFEST_FINALIZED = "manifest_finalized"
    DONE = "done"
    FAILED = "failed"


class GenerationRun:
    """One invocation of the generator. Not reusable."""

    def __init__(self, project_name: str, run=run_command, ask=input, system=None,
                 template_dir: str = TEMPLATE_DIR, config=settings):
        self.project_name = project_name
        self.run = run
        self.ask = ask
        self.system = system
        self.template_dir = template_dir
        self.config = config

        self.stage = Stage.IDLE
        self.choice = None
        self.project_root = None
        self.dependencies = None
        self.copied_files = []
        self.pods_installed = False

    def execute(self):
        if self.stage is not Stage.IDLE:
            raise RuntimeError(f"Generation run already {self.stage.value}")
        try:
            self._collect_prompts()
            self._initialize_project()
            self._compose_files()
            self._install_dependencies()
            self._configure_platform()
            self._finalize_manifest()
        except BaseException:
            self.stage = Stage.FAILED
            raise

        self.stage = Stage.DONE
        print_completion_report(self.choice)
        return self

    def _collect_prompts(self):
        self.choice = collect_choices(self.project_name, ask=self.ask)
        self.stage = Stage.PROMPTS_COLLECTED

    def _initialize_project(self):
        self.project_root = initialize_project(self.choice, run=self.run, config=self.config)
        self.stage = Stage.PROJECT_INITIALIZED

    def _compose_files(self):
        self.copied_files = compose_template(self.choice, source_dir=self.template_dir,
                                             dest_dir=os.getcwd())
        self.stage = Stage.FILES_COMPOSED

    def _install_dependencies(self):
        self.dependencies = plan_dependencies(self.choice)
        install_dependencies(self.dependencies, run=self.run, config=self.config)
        self.stage = Stage.DEPENDENCIES_INSTALLED

    def _configure_platform(self):
        self.pods_installed = install_ios_pods(self.choice, run=self.run, system=self.system,
                                               config=self.config)
        self.stage = Stage.PLATFORM_CONFIGURED

    def _finalize_manifest(self):
        finalize_manifest()
        self.stage = Stage.MANIFEST_FINALIZED


def print_completion_report(choice):
    print("\n✅ Project created successfully!")
    print(f"\n📁 Navigate to your project: cd {choice.project_name}")
    print("🏃 Run the app:")

    if choice.use_expo:
        print("  • Start: npm start")
        print("  • iOS: npm run ios")
        print("  • Android: npm run android")
    else:
        print("  • iOS: npm run ios")
        print("  • Android: npm run android")
        print("  • Start Metro: npm start")

    print("\n🔧 Development tools:")
    print("  • Run tests: npm test")
    print("  • Lint code: npm run lint")
    print("  • Type check: npm run type-check")
    if choice.include_storybook:
        print("  • Storybook: npm run storybook")
    if choice.include_detox:
        print("  • E2E tests: npm run test:e2e")

    print("\n📚 Demo credentials:")
    print("  • Email: demo@example.com")
    print("  • Password: password123")

    print("\n🎉 Happy coding!")


def generate_project(project_name: str, **kwargs) -> GenerationRun:
    return GenerationRun(project_name, **kwargs).execute()
