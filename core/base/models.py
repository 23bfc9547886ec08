from datetime import date, timedelta
from django.db import models, transaction
from django.utils import timezone
from django.core.exceptions import ValidationError
from django.db.models import Q


class AuditMixin(models.Model):
    """
    Adds timestamps to track creation and modification.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified

    Usage:
        class Site(AuditMixin):
            name = models.CharField(max_length=100)
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True


class FieldMergeMixin(models.Model):
    """
    Partial update support for plain (non-versioned) records.

    Services collect only the fields the caller actually sent and hand them
    to update_fields(); every other column keeps its stored value.
    """

    class Meta:
        abstract = True

    def update_fields(self, field_updates: dict):
        """
        Update the given fields, validate and save.

        Unique columns are left to the database constraint so a duplicate
        surfaces as IntegrityError (translated to a 409) rather than a
        field error.

        Args:
            field_updates: Dict of field_name -> new_value for fields to update

        Returns:
            self (for chaining)

        Example:
            site.update_fields({'name': 'North Plant'})
        """
        for field_name, value in field_updates.items():
            setattr(self, field_name, value)
        self.full_clean(validate_unique=False)
        with transaction.atomic():
            self.save()
        return self


class EffectiveDatedMixin(models.Model):
    """
    Mixin for rows that hold a value over a period of time.

    Each subject (e.g. an employer) owns a chain of periods. The period with
    valid_to = NULL is the current one; there is at most one per subject.
    A closed period ends the day before its successor starts.

    Fields:
        - valid_from: First day the value holds
        - valid_to: Last day the value holds (NULL = current period)

    Subclasses implement get_period_subject_fields() naming the FK field(s)
    that identify the subject, and should declare a partial unique constraint
    on those fields with condition valid_to__isnull=True.

    Usage:
        class EmployerTaxRegime(EffectiveDatedMixin, AuditMixin):
            employer = models.ForeignKey(Employer, on_delete=models.PROTECT)
            tax_regime = models.ForeignKey(TaxRegime, on_delete=models.PROTECT)
            objects = EffectiveDatedManager()

            @classmethod
            def get_period_subject_fields(cls):
                return ['employer']

        EmployerTaxRegime.open_period({'employer': employer}, {'tax_regime': regime})
    """
    valid_from = models.DateField(
        help_text="First day this value holds"
    )
    valid_to = models.DateField(
        null=True,
        blank=True,
        help_text="Last day this value holds. NULL = current period"
    )

    class Meta:
        abstract = True
        ordering = ['-valid_from']

    @property
    def is_current(self):
        return self.valid_to is None

    def active_on(self, reference_date):
        """Return True when reference_date falls inside this period (both ends inclusive)."""
        if self.valid_from > reference_date:
            return False
        if self.valid_to is not None and self.valid_to < reference_date:
            return False
        return True

    @classmethod
    def get_period_subject_fields(cls):
        raise NotImplementedError(
            f"{cls.__name__} must implement get_period_subject_fields()"
        )

    def get_subject_filter(self):
        subject = {}
        for field_name in self.get_period_subject_fields():
            attname = self._meta.get_field(field_name).attname
            subject[attname] = getattr(self, attname)
        return subject

    @classmethod
    def open_period(cls, subject: dict, values: dict, effective_date=None):
        """
        Close the subject's current period and open a new one.

        Both writes happen in one transaction. When effective_date equals the
        start of the current period the current row is corrected in place
        instead, so no zero-length period is ever written.

        Args:
            subject: Dict of subject field -> value (e.g. {'employer': employer})
            values: Dict of field -> value for the new period
            effective_date: First day of the new period (default: today)

        Returns:
            The newly opened (or corrected) period

        Raises:
            ValidationError: effective_date is before the current period's start
        """
        if effective_date is None:
            effective_date = timezone.localdate()

        with transaction.atomic():
            current = (
                cls.objects.select_for_update()
                .filter(**subject, valid_to__isnull=True)
                .first()
            )

            if current is not None:
                if effective_date < current.valid_from:
                    raise ValidationError({
                        'valid_from': (
                            f"Effective date {effective_date} is before the current "
                            f"period start {current.valid_from}"
                        )
                    })
                if effective_date == current.valid_from:
                    for field_name, value in values.items():
                        setattr(current, field_name, value)
                    current.full_clean()
                    current.save()
                    return current

                current.valid_to = effective_date - timedelta(days=1)
                current.save(update_fields=['valid_to'])

            period = cls(**subject, **values, valid_from=effective_date, valid_to=None)
            period.full_clean()
            period.save()
            return period

    def clean(self):
        """Validate date order and prevent overlapping periods for the same subject."""
        if self.valid_to and self.valid_from and self.valid_from > self.valid_to:
            raise ValidationError({
                'valid_to': 'Start date must be on or before end date'
            })

        try:
            subject = self.get_subject_filter()
        except NotImplementedError:
            return
        if any(value is None for value in subject.values()) or self.valid_from is None:
            return

        overlapping = self.__class__.objects.filter(
            **subject,
            valid_from__lte=(self.valid_to or date.max),
        ).exclude(pk=self.pk).filter(
            Q(valid_to__isnull=True) |
            Q(valid_to__gte=self.valid_from)
        )

        if overlapping.exists():
            raise ValidationError({
                'valid_from': 'Period overlaps an existing period for the same subject'
            })
