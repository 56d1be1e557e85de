"""
String table for the two supported locales.

Keys are stable identifiers; band keys match Band values so a Band can be
looked up directly.
"""

from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "id": {
        # Bands
        "below_average": "Kurang Baik",
        "fair": "Cukup",
        "good": "Baik",
        "excellent": "Sangat Baik",
        "invalid": "Tidak Valid",
        # Form
        "app_title": "Tes Keterampilan Tenis Meja",
        "subject_section": "Data Peserta",
        "full_name": "Nama Lengkap",
        "name_placeholder": "Masukkan nama lengkap",
        "age": "Umur",
        "age_placeholder": "Masukkan umur",
        "gender": "Jenis Kelamin",
        "select_gender": "Pilih jenis kelamin",
        "male": "Laki-laki",
        "female": "Perempuan",
        "movement_test": "Tes Gerak",
        "outcome_test": "Hasil Tes",
        "score_placeholder": "0-30",
        "mean": "Rata-rata",
        "calculate": "Hitung",
        "reset": "Reset",
        "language_name": "Indonesia",
        # Validation modal
        "modal_title": "Nilai Tidak Valid",
        "value_out_of_range": "Nilai harus berupa angka bulat antara 0 dan 30.",
        "ok": "Mengerti",
        # Result summary
        "result_title": "Hasil Perhitungan",
        "final_total_score": "Total Skor Akhir",
        "msg_excellent": "Luar biasa! Pertahankan prestasimu.",
        "msg_improve": "Tetap semangat dan terus berlatih untuk hasil yang lebih baik.",
        "thank_you": "Terima kasih telah mengikuti tes ini.",
        # Export
        "download_pdf": "Unduh PDF",
        "generating": "Membuat PDF...",
        "export_failed": "Gagal membuat PDF. Silakan coba lagi.",
    },
    "en": {
        # Bands
        "below_average": "Below Average",
        "fair": "Fair",
        "good": "Good",
        "excellent": "Excellent",
        "invalid": "Invalid",
        # Form
        "app_title": "Table Tennis Skill Test",
        "subject_section": "Participant Details",
        "full_name": "Full Name",
        "name_placeholder": "Enter full name",
        "age": "Age",
        "age_placeholder": "Enter age",
        "gender": "Gender",
        "select_gender": "Select gender",
        "male": "Male",
        "female": "Female",
        "movement_test": "Movement Test",
        "outcome_test": "Outcome Test",
        "score_placeholder": "0-30",
        "mean": "Mean",
        "calculate": "Calculate",
        "reset": "Reset",
        "language_name": "English",
        # Validation modal
        "modal_title": "Invalid Value",
        "value_out_of_range": "Value must be a whole number between 0 and 30.",
        "ok": "Got it",
        # Result summary
        "result_title": "Calculation Result",
        "final_total_score": "Final Total Score",
        "msg_excellent": "Outstanding! Keep up the great work.",
        "msg_improve": "Keep going and keep practicing for a better result.",
        "thank_you": "Thank you for taking this test.",
        # Export
        "download_pdf": "Download PDF",
        "generating": "Generating PDF...",
        "export_failed": "Failed to create the PDF. Please try again.",
    },
}
