#!/usr/bin/env python3
from __future__ import annotations

import re
import os
import setuptools
import pathlib
import sys
import toml

__prefix__ = os.getenv('BYTECASE_PREFIX') or ''
__minver__ = '3.8'
__github__ = 'https://github.com/binref/bytecase/'
__gitraw__ = 'https://raw.githubusercontent.com/binref/bytecase/'
__author__ = 'Jesko Huettenhain'
__slogan__ = 'Unicode case mapping for conventionally UTF-8 encoded bytes.'
__topics__ = [
    'Development Status :: 3 - Alpha',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Text Processing',
    'Topic :: Text Processing :: Filters',
]

__build__ = {'setuptools', 'wheel', 'toml'}


class DeployCommand(setuptools.Command):
    description = 'Tag and push new release.'
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    @staticmethod
    def main():
        import subprocess
        import shlex
        import bytecase
        import os

        from pathlib import Path

        DEVNULL = open(os.devnull, 'wb')

        def run(cmd):
            print(F'run: {cmd}')
            return subprocess.check_call(
                shlex.split(cmd),
                stdout=DEVNULL,
                stderr=DEVNULL,
                cwd=os.getcwd(),
            )

        root = Path(bytecase.__file__).parent.parent
        os.chdir(root)

        try:
            run(F'git tag {bytecase.__version__}')
            run(R'git push')
            run(R'git push --tags')
        except subprocess.CalledProcessError as E:
            print(F'error: {E!s}')
            return 1
        else:
            return 0

    def run(self):
        sys.exit(self.main())


def get_config():
    here = pathlib.Path(__file__).parent.absolute()
    sys.path.insert(0, str(here))

    import bytecase
    from bytecase.lib.loader import get_entry_point_map

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = here.joinpath('README.md')
        with open(filename, 'r', encoding='UTF8') as README:
            def complete_link(match):
                link: str = match[1]
                if any(link.lower().endswith(xt) for xt in ('jpg', 'gif', 'png', 'svg')):
                    return F'({__gitraw__}master/{link})'
                else:
                    return F'({__github__}blob/master/{link})'
            readme = README.read()
            return re.sub(R'(?<=\])\((?!\w+://)(.*?)\)', complete_link, readme)

    if __prefix__ == '!':
        console_scripts = []
    else:
        console_scripts = [
            F'{__prefix__}{name}={unit.__module__}:{unit.__name__}.run'
            for name, unit in get_entry_point_map().items()
        ]

    ppcfg: dict[str, dict[str, list[str]]] = toml.load(str(here.joinpath('pyproject.toml')))
    requirements = [
        r for r in ppcfg['build-system']['requires'] if r not in __build__]

    config = dict(
        name=bytecase.__distribution__,
        version=bytecase.__version__,
        long_description=get_setup_readme(),
        author=__author__,
        description=__slogan__,
        long_description_content_type='text/markdown',
        url=__github__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__ + ['Topic :: Utilities'],
        packages=setuptools.find_packages(include=('bytecase*',)),
        install_requires=requirements,
        extras_require={'test': ['pytest', 'pyflakes', 'pycodestyle', 'flake8']},
        include_package_data=True,
        entry_points={'console_scripts': console_scripts},
        cmdclass={'deploy': DeployCommand},
    )

    return config


if __name__ == '__main__':
    setuptools.setup(**get_config())
