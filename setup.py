from setuptools import setup, find_packages

setup(
    name="claude-agents-md",
    version="1.0.0",
    description="Run the Claude CLI with AGENTS.md in place of CLAUDE.md",
    packages=find_packages(include=["claude_agents_md", "claude_agents_md.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "rich>=13.0",
        "halo>=0.0.31",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "claude-agents-md=claude_agents_md.cli:main",
        ],
    },
)
