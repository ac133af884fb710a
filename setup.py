from setuptools import setup, find_packages

setup(
   name="redisdocs",
   version="0.1",
   description="Document collections with mongo-style queries on top of Redis",
   package_dir={"": "src"},
   packages=find_packages(where="src"),
   include_package_data=True,
   python_requires=">=3.10",
   install_requires=[
      "redis>=5.0.1",
      "pydantic>=2.0",
   ],
   extras_require={
      "test": [
         "pytest>=7.0",
         "pytest-asyncio>=0.21",
      ],
   },
)
