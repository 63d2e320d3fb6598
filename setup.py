from setuptools import setup, find_packages
import os

exec(open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'procsys', '_version.py')).read())

with open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

name = 'procsys'
author = 'procsys developers'

setup(
    name=name,
    version=__version__,
    description='Typed access to kernel values under /proc/sys/kernel',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author=author,
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='procfs sysctl linux',
    packages=find_packages(exclude=['tests', 'tests.*', 'examples', 'examples.*']),
    python_requires='>=3.7',
    install_requires=[],
    extras_require={'test': ['pytest']},
)
