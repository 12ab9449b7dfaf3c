"""Forms for members app."""

from django import forms


class LoginForm(forms.Form):
    """Identity provider credentials."""

    email = forms.EmailField()
    password = forms.CharField(widget=forms.PasswordInput, strip=False)
