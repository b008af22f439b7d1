"""
Forms for the storefront product pages.
"""

from django import forms


class ProductForm(forms.Form):
    """Product creation form; the image upload field is ``image``."""

    name = forms.CharField(max_length=255)
    description = forms.CharField(required=False, widget=forms.Textarea)
    price = forms.DecimalField(max_digits=12, decimal_places=2)
    brand = forms.CharField(required=False, max_length=255)
    image = forms.FileField()


class ProductEditForm(forms.Form):
    """Product edit form; a new image is optional and sent as ``imageFile``."""

    name = forms.CharField(max_length=255)
    description = forms.CharField(required=False, widget=forms.Textarea)
    price = forms.DecimalField(max_digits=12, decimal_places=2)
    brand = forms.CharField(required=False, max_length=255)
    imageFile = forms.FileField(required=False)  # noqa: N815
