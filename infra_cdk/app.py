# infra_cdk/app.py
import aws_cdk as cdk

from site_builder_stack import SiteBuilderStack

app = cdk.App()
SiteBuilderStack(app, "PhotoSiteBuilderStack")
app.synth()
