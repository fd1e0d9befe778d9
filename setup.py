# Copyright 2024 The CloudWatch Agent Operator Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import setuptools

TESTS_REQUIRES = [
    'pytest',
    'pytest-xdist',
    'pytest-cov',
    'mypy'
]

with open('requirements.txt') as f:
    REQUIRES = f.readlines()

setuptools.setup(
    name='cwagent-operator',
    version='0.1.0',
    author="The CloudWatch Agent Operator Authors",
    license="Apache License Version 2.0",
    description="Reconciliation core for the Amazon CloudWatch Agent operator",
    long_description="Task pipeline and deterministic manifest synthesis for "
                     "AmazonCloudWatchAgent custom resources.",
    python_requires='>=3.9',
    packages=[
        'cwagent_operator',
        'cwagent_operator.api',
        'cwagent_operator.constants',
        'cwagent_operator.manifests',
        'cwagent_operator.models',
        'cwagent_operator.reconcile',
        'cwagent_operator.utils',
    ],
    package_data={'': ['requirements.txt']},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        'Topic :: Software Development',
        'Topic :: System :: Monitoring',
    ],
    install_requires=REQUIRES,
    tests_require=TESTS_REQUIRES,
    extras_require={'test': TESTS_REQUIRES}
)
