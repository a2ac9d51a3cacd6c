"""Engine package - Business rules on top of phone classification.

Modules:
    - sender: Sender name truncation and MTN override
    - contacts: Contact form and bulk import validation
    - messaging: Send one SMS to a contact
"""
