from setuptools import setup, find_packages

setup(
    name="beefcake-plugin",
    version="0.1.0",
    description="A protoc plugin generating Beefcake message declarations for Ruby",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    entry_points={
        "console_scripts": ["protoc-gen-beefcake=beefcake_plugin.plugin:main"]
    },
    packages=find_packages(exclude=["tests", "*.tests", "*.tests.*"]),
    package_data={"beefcake_plugin": ["templates/*.j2"]},
    python_requires=">=3.8",
    install_requires=["jinja2", "protobuf"],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
